"""Simple example clustering Gaussian blobs with LinearKMeansEngine.

Each example carries a dense representation named "vector"; the engine seeds
with the first k examples and iterates until no example changes cluster.
"""

import logging
import sys
import os

# Add current directory to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from kmeans import ClusteringError, LinearKMeansEngine, create_sample_dataset, evaluate_clustering


def simple_example():
    """Simple example demonstrating K-means usage."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("🎯 Simple LinearKMeansEngine Example")
    print("=" * 50)

    dataset = create_sample_dataset(n_samples=600, n_features=8, centers=5, random_state=42)
    print(f"Using {len(dataset)} examples")

    engine = LinearKMeansEngine(representation_name="vector", k=5, max_iterations=50)
    print(f"\nCreating {engine!r}...")

    try:
        clusters = engine.cluster(dataset)
    except ClusteringError as e:
        print(f"❌ Error: {e}")
        return False

    info = evaluate_clustering(clusters, "vector")
    print(f"\nResults:")
    print(f"  Iterations: {engine.n_iter_}")
    print(f"  Reassignments per iteration: {engine.reassignments_}")
    print(f"  Inertia: {info['inertia']:.2f}")
    silhouette = info['silhouette']
    print(f"  Silhouette: {silhouette:.3f}" if silhouette is not None else "  Silhouette: -")

    print(f"\nCluster distribution:")
    for cluster in clusters:
        closest = cluster.members[0] if cluster.members else None
        print(f"  {cluster.id}: {len(cluster)} examples, closest: {closest.example.labels if closest else '-'}")

    print("\n✅ Example completed successfully!")
    return True


if __name__ == "__main__":
    simple_example()

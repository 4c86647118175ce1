"""Dense matrix, activation functions, feed-forward layers and an IDX reader for MNIST."""

__version__ = "0.1.0"
__all__ = ["activations", "cli", "debug", "idx", "matrix", "neural"]
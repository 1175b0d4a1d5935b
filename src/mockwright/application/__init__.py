"""Application layer: synthesis, assembly, instantiation and the invocation pipeline."""

"""Core services: logging, errors, configuration, versioning and the pipeline."""

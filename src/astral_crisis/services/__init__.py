"""Service layer: detectors and the safety pipeline."""

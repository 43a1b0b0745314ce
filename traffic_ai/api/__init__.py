"""Google Maps backed query pipeline."""

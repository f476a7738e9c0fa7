"""Static plots generated from the runner's CSV output."""

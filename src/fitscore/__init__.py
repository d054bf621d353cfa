"""fitscore -- explainable 0-100 fitness scores from health metrics."""

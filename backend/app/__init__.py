"""HTTP backend serving the equation solver and the statistics panel."""

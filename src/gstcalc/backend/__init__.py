"""Backend services for the GSTCalc project."""

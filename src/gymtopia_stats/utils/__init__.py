"""Calendar and exercise-name helpers."""

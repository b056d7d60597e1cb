"""maxlift: personal lift log with PR tracking and percentage charts."""

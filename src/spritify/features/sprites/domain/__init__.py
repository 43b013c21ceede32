"""Domain records and errors for sprite generation."""

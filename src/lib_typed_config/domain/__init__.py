"""Domain layer: error taxonomy and field-name rules."""

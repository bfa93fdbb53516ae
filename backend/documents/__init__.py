"""Document format readers and writers."""

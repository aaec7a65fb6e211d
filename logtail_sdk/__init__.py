"""Log record processors for the logtail pipeline."""

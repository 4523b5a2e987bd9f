"""Process sampling and the tick loop that feeds the histories."""

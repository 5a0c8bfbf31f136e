"""History Application Layer."""

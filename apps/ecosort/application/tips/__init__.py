"""Tips Application Layer."""

"""colb - a colcon wrapper for faster change-compile-test cycles."""

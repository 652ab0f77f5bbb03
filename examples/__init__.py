"""Example scripts for rendermath."""

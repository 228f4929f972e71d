"""Source modules of the cellgrid package."""

"""Find duplicated rectangular regions between raster images."""

"""Earth-orientation transforms: fundamental arguments and the subdiurnal polar motion model."""

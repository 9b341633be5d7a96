"""PIX BR Code payload encoder."""

"""Client for the Perspective comment analyzer API."""

"""Example long-polling bot built on :mod:`botapi`."""

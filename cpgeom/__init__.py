"""2D geometry toolkit: vectors, transforms and bounding boxes, convex hulls, polylines, marching squares and a spatial hash."""

__version__ = "0.1.0"
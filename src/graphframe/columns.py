"""Column names recognized in vertex and edge tables."""

# Vertex tables
ID = "id"

# Edge tables
SRC = "src"
DST = "dst"

# Reserved for algorithm-specific attributes and message payloads.
# Never validated or interpreted by GraphFrame itself.
EDGE = "edge"
MSG = "msg"

# Degree outputs
OUT_DEGREE = "out_degree"
IN_DEGREE = "in_degree"

__all__ = ["ID", "SRC", "DST", "EDGE", "MSG", "OUT_DEGREE", "IN_DEGREE"]

"""Building blocks for message-oriented servers: frame decoding, interceptor chains, logging and AOI grids."""

__version__ = "0.1.0"
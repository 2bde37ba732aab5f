"""A flappy-bird style arcade game and small pygame drawing and input demos."""

__version__ = "0.1.0"
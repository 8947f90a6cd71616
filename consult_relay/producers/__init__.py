"""Result producers: the pluggable source of generated payloads."""

from .base import ResultProducer
from .synthetic import SyntheticResultProducer

__all__ = ["ResultProducer", "SyntheticResultProducer"]

"""city-brief -- ask a local Ollama model what a city is known for."""

__version__ = '0.1.0'

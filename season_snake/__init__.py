"""Season Snake: grid snake game engine served over WebSocket."""

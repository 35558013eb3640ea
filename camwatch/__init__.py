"""Camera sources, class filtering, detection-event storage and display state for multi-camera object tracking."""

__version__ = "0.1.0"
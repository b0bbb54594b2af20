"""Editor of plane figures with area, perimeter and centre readouts and a text command front end."""

__version__ = "0.1.0"
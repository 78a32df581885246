"""
Application Layer

Orchestrates domain objects against infrastructure ports.

Structure:
- interfaces/: port interfaces for the playback node and track search
- services/: the player session controller and its manager
"""

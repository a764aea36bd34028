"""
newsreel - Terminal news reader backed by the NewsAPI service
"""

__version__ = "0.3.0"

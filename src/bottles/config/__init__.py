from .loader import SongConfig, load_song_config

__all__ = ["SongConfig", "load_song_config"]

"""Core logging domain: levels, entries, ports and the logger."""

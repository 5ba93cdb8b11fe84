"""HTTP API for the coaching dashboard."""

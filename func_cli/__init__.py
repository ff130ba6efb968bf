"""func-cli: scaffold function projects and connect to serving/eventing platforms."""

__version__ = "0.1.0"

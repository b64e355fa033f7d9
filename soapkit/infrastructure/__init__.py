"""XML codec and transports."""

"""Ports - inbound and outbound contracts of the subset controller."""

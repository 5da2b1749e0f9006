"""Ports for collaborators the subscription core depends on."""

from uocplay.ports.people import PeopleDirectory

__all__ = ["PeopleDirectory"]

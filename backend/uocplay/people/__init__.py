from uocplay.people.in_memory import InMemoryPeople

__all__ = ["InMemoryPeople"]

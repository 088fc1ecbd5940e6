"""Domain layer: value objects, the Meeting aggregate and filters over it.

Nothing here performs I/O.  Value objects are immutable; a Meeting's
participant set is the only state that changes after construction.
"""

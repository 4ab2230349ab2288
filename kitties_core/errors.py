from __future__ import annotations


class KittiesError(Exception):
    pass


class CounterOverflow(KittiesError):
    """The kitty identity space is exhausted."""

    def __init__(self, max_kitty_id: int):
        super().__init__(f"kitties count overflow (max id {max_kitty_id})")
        self.max_kitty_id = max_kitty_id


class NotFound(KittiesError):
    def __init__(self, kitty_id: int):
        super().__init__(f"invalid kitty id {kitty_id}")
        self.kitty_id = kitty_id


class IdenticalParents(KittiesError):
    def __init__(self, kitty_id: int):
        super().__init__(f"breeding requires two different parents, got kitty {kitty_id} for both")
        self.kitty_id = kitty_id


class NotOwner(KittiesError):
    def __init__(self, owner: str, kitty_id: int):
        super().__init__(f"{owner} has no permission to transfer kitty {kitty_id}")
        self.owner = owner
        self.kitty_id = kitty_id

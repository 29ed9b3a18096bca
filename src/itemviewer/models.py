from dataclasses import dataclass


@dataclass
class Item:
    """An entry of the item list returned by the item service."""

    id: int
    name: str

    @classmethod
    def from_dict(cls, data):
        # raises KeyError/TypeError when the backend sends the wrong shape
        item_id, name = data["id"], data["name"]
        if isinstance(item_id, bool) or not isinstance(item_id, int):
            raise TypeError(f"item id must be an integer, got {item_id!r}")
        if not isinstance(name, str):
            raise TypeError(f"item name must be a string, got {name!r}")
        return cls(id=item_id, name=name)

"""
Связка «меш ↔ материал» – по одной на каждую группу `usemtl`.
"""


class Model:
    """Ссылается на меш и материал по имени (не по объекту)."""
    def __init__(self, mesh_name: str, material_name: str):
        self.mesh_name = mesh_name
        self.material_name = material_name

    def to_dict(self) -> dict:
        return {"mesh": self.mesh_name, "material": self.material_name}

    def __eq__(self, other):
        if not isinstance(other, Model):
            return NotImplemented
        return (self.mesh_name, self.material_name) == (other.mesh_name, other.material_name)

    def __repr__(self):
        return f"Model(mesh={self.mesh_name!r}, material={self.material_name!r})"

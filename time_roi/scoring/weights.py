"""Weight triple for the weighted Time ROI score."""

from dataclasses import dataclass

# camelCase keys come from the browser UI
_KEY_ALIASES = {
    "effort": ("effort",),
    "skill_growth": ("skill_growth", "skillGrowth"),
    "perceived_value": ("perceived_value", "perceivedValue"),
}


@dataclass(frozen=True)
class Weights:
    """Fractional contribution of each input dimension. Must sum to 1.0."""

    effort: float
    skill_growth: float
    perceived_value: float

    @classmethod
    def from_dict(cls, data: dict) -> "Weights":
        """
        Build from a mapping with snake_case or camelCase keys.
        Missing keys become None and are rejected later by validate_inputs.
        """
        values = {}
        for field_name, keys in _KEY_ALIASES.items():
            values[field_name] = next((data[k] for k in keys if k in data), None)
        return cls(**values)

    def as_tuple(self) -> tuple:
        return (self.effort, self.skill_growth, self.perceived_value)

    def to_dict(self) -> dict:
        return {
            "effort": self.effort,
            "skill_growth": self.skill_growth,
            "perceived_value": self.perceived_value,
        }


DEFAULT_WEIGHTS = Weights(effort=0.2, skill_growth=0.3, perceived_value=0.5)

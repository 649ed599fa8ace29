"""スーパーヒーローAPIのスキーマ."""

from .superhero import SuperheroCreate, SuperheroResponse

__all__ = ["SuperheroCreate", "SuperheroResponse"]

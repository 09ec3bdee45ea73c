"""Core building blocks for a component-based 2D game engine: vectors, easing,
random helpers, components, transforms, game objects, cameras, collision,
rigid bodies, input state and trails."""

__version__ = "0.1.0"

__all__ = [
    "vector2",
    "easing",
    "game_random",
    "components",
    "transform",
    "game_object",
    "camera",
    "collision",
    "rigidbody",
    "input",
    "trail",
]
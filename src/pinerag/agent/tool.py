from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any


@dataclass
class Tool:
    """
    Definition of a tool that can be used by an agent.
    """
    name: str
    description: str
    func: Callable[..., Awaitable[Any]]
    parameters: dict[str, Any]  # JSON Schema for arguments

    def to_openai(self) -> dict[str, Any]:
        """Function-calling declaration in the OpenAI ``tools`` format."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }

    async def __call__(self, **kwargs: Any) -> Any:
        return await self.func(**kwargs)

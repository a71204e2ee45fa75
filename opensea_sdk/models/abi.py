"""Annotated contract ABI entries.

Each input and output of a function is tagged with its semantic role (the
asset, the owner, an index...) so generic calldata builders can fill in a
call without per-contract logic.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..enums import AbiType, FunctionInputKind, FunctionOutputKind, StateMutability
from ..errors import SchemaValidationError
from ..utils.conversions import parse_enum

# Plain ABI items as produced by a compiler, used for read-only calls
PartialReadonlyContractAbi = List[Dict[str, Any]]

_MISSING = object()


@dataclass
class AnnotatedFunctionInput:
    name: str
    type: str
    kind: FunctionInputKind
    value: Any = _MISSING

    def __post_init__(self):
        self.kind = parse_enum(FunctionInputKind, self.kind, "input.kind")

    @property
    def has_value(self) -> bool:
        return self.value is not _MISSING

    def to_dict(self) -> Dict[str, Any]:
        data = {"name": self.name, "type": self.type, "kind": self.kind.value}
        if self.has_value:
            data["value"] = self.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AnnotatedFunctionInput':
        try:
            return cls(
                name=data["name"],
                type=data["type"],
                kind=data["kind"],
                value=data.get("value", _MISSING),
            )
        except KeyError as e:
            raise SchemaValidationError(f"Annotated input is missing {e}") from e


@dataclass
class AnnotatedFunctionOutput:
    name: str
    type: str
    kind: FunctionOutputKind

    def __post_init__(self):
        self.kind = parse_enum(FunctionOutputKind, self.kind, "output.kind")

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "type": self.type, "kind": self.kind.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AnnotatedFunctionOutput':
        try:
            return cls(name=data["name"], type=data["type"], kind=data["kind"])
        except KeyError as e:
            raise SchemaValidationError(f"Annotated output is missing {e}") from e


@dataclass
class AnnotatedFunctionABI:
    """A contract function ABI entry with role-annotated inputs and outputs."""
    type: AbiType
    name: str
    target: str
    inputs: List[AnnotatedFunctionInput] = field(default_factory=list)
    outputs: List[AnnotatedFunctionOutput] = field(default_factory=list)
    constant: bool = False
    state_mutability: StateMutability = StateMutability.NONPAYABLE
    payable: bool = False

    def __post_init__(self):
        self.type = parse_enum(AbiType, self.type, "type")
        self.state_mutability = parse_enum(StateMutability, self.state_mutability, "stateMutability")

    def inputs_of_kind(self, kind: FunctionInputKind) -> List[AnnotatedFunctionInput]:
        """All inputs playing the given role, in declaration order."""
        return [i for i in self.inputs if i.kind == kind]

    def output_of_kind(self, kind: FunctionOutputKind) -> Optional[AnnotatedFunctionOutput]:
        """The first output playing the given role, if any."""
        return next((o for o in self.outputs if o.kind == kind), None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "name": self.name,
            "target": self.target,
            "inputs": [i.to_dict() for i in self.inputs],
            "outputs": [o.to_dict() for o in self.outputs],
            "constant": self.constant,
            "stateMutability": self.state_mutability.value,
            "payable": self.payable,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AnnotatedFunctionABI':
        """Parse an annotated ABI entry from its JSON form.

        Raises:
            SchemaValidationError: If required keys are missing or a kind is unknown.
        """
        try:
            return cls(
                type=data["type"],
                name=data["name"],
                target=data["target"],
                inputs=[AnnotatedFunctionInput.from_dict(i) for i in data.get("inputs", [])],
                outputs=[AnnotatedFunctionOutput.from_dict(o) for o in data.get("outputs", [])],
                constant=bool(data.get("constant", False)),
                state_mutability=data.get("stateMutability", StateMutability.NONPAYABLE),
                payable=bool(data.get("payable", False)),
            )
        except KeyError as e:
            raise SchemaValidationError(f"Annotated function ABI is missing {e}") from e

"""
Conversion Data Model
Rules, declarations and results passed between the parser and the converter.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class CSSDeclaration:
    property: str
    value: str
    important: bool = False

    def to_dict(self) -> Dict:
        return {'property': self.property, 'value': self.value, 'important': self.important}


@dataclass(frozen=True)
class PseudoInfo:
    """Tailwind variant names (or [&:...] escapes) found in one selector."""
    classes: Tuple[str, ...] = ()
    elements: Tuple[str, ...] = ()

    def is_empty(self) -> bool:
        return not self.classes and not self.elements

    def to_dict(self) -> Dict:
        return {'classes': list(self.classes), 'elements': list(self.elements)}


@dataclass
class CSSRule:
    selector: str
    base_selector: str
    pseudo_info: PseudoInfo = field(default_factory=PseudoInfo)
    declarations: List[CSSDeclaration] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            'selector': self.selector,
            'baseSelector': self.base_selector,
            'pseudoInfo': self.pseudo_info.to_dict(),
            'declarations': [d.to_dict() for d in self.declarations],
        }


@dataclass(frozen=True)
class UnconvertibleDeclaration:
    property: str
    value: str
    reason: str

    def to_dict(self) -> Dict:
        return {'property': self.property, 'value': self.value, 'reason': self.reason}


@dataclass
class ConversionResult:
    selector: str
    base_selector: str
    pseudo_info: PseudoInfo = field(default_factory=PseudoInfo)
    tailwind_classes: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    unconvertible: List[UnconvertibleDeclaration] = field(default_factory=list)

    @property
    def class_string(self) -> str:
        return ' '.join(self.tailwind_classes)

    def to_dict(self) -> Dict:
        return {
            'selector': self.selector,
            'baseSelector': self.base_selector,
            'pseudoInfo': self.pseudo_info.to_dict(),
            'tailwindClasses': list(self.tailwind_classes),
            'warnings': list(self.warnings),
            'unconvertible': [u.to_dict() for u in self.unconvertible],
        }

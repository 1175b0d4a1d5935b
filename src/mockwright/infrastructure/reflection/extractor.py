"""Type descriptor extractor.

Reads a live class through inspect and produces a TargetDescriptor.
Stateless adapter, FAIL-FIRST on targets that cannot be subclassed.
"""

from __future__ import annotations

import abc
import dataclasses
import enum
import importlib
import inspect
import typing
from typing import TYPE_CHECKING

from mockwright.domain.exceptions import InvalidTargetError
from mockwright.domain.model.enums import DispatchKind, ParameterKind, TargetKind, Visibility
from mockwright.domain.model.method_signature import MethodSignature
from mockwright.domain.model.parameter import NO_DEFAULT, Parameter
from mockwright.domain.model.target import ConstructorInfo, TargetDescriptor
from mockwright.infrastructure.reflection.annotations import (
    allows_none,
    format_annotation,
    is_reference,
    return_contract,
)

if TYPE_CHECKING:
    from collections.abc import Callable

# Py_TPFLAGS_BASETYPE: type may be subclassed
_TPFLAGS_BASETYPE = 1 << 10

_SKIPPED_BASES: frozenset[type] = frozenset({object, typing.Protocol, typing.Generic, abc.ABC})

# Object lifecycle, annotation, attribute access, pickling/copy, descriptor and
# identity hooks are never intercepted. __getattr__ is kept: it is the dynamic-dispatch hook.
_EXCLUDED_METHODS = frozenset(
    {
        "__init__",
        "__new__",
        "__del__",
        "__init_subclass__",
        "__class_getitem__",
        "__annotate__",
        "__annotate_func__",
        "__subclasshook__",
        "__instancecheck__",
        "__subclasscheck__",
        "__getattribute__",
        "__setattr__",
        "__delattr__",
        "__dir__",
        "__getstate__",
        "__setstate__",
        "__getnewargs__",
        "__getnewargs_ex__",
        "__reduce__",
        "__reduce_ex__",
        "__copy__",
        "__deepcopy__",
        "__sizeof__",
        "__set_name__",
        "__get__",
        "__set__",
        "__delete__",
        "__eq__",
        "__ne__",
        "__hash__",
    }
)

# typing.Protocol installs these placeholders as __init__ on protocol classes
_PROTOCOL_INIT_NAMES = frozenset({"_no_init", "_no_init_or_replace_init"})


def _empty() -> None: ...


def _documented() -> None:
    """Docstring only."""


async def _empty_async() -> None: ...


async def _documented_async() -> None:
    """Docstring only."""


# Bytecode of bodies made of a docstring, "..." or "pass"
_PLACEHOLDER_BODIES = frozenset(
    f.__code__.co_code for f in (_empty, _documented, _empty_async, _documented_async)
)


def qualified_name(cls: type) -> str:
    """module.QualName of a class."""
    return f"{cls.__module__}.{cls.__qualname__}"


def resolve_target(path: str) -> type:
    """Import a class from 'pkg.mod:Outer.Inner' or 'pkg.mod.Outer.Inner'.

    Raises:
        InvalidTargetError: If the module or class does not exist,
            or the path does not name a class.
    """
    module_name, sep, attr_path = path.partition(":")
    if sep:
        module = _import_module(path, module_name)
        attrs = attr_path.split(".")
    else:
        module, attrs = _import_longest_prefix(path)

    obj: object = module
    for attr in attrs:
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise InvalidTargetError(
                path, "does not exist. Check the spelling and make sure it is importable"
            ) from e

    if not isinstance(obj, type):
        raise InvalidTargetError(path, f"is a {type(obj).__name__}, not a class")
    return obj


def _import_module(path: str, module_name: str) -> object:
    if not module_name:
        raise InvalidTargetError(path, "expected 'module:Class' or 'module.Class'")
    try:
        return importlib.import_module(module_name)
    except ImportError as e:
        raise InvalidTargetError(path, f"module {module_name!r} cannot be imported") from e


def _import_longest_prefix(path: str) -> tuple[object, list[str]]:
    parts = path.split(".")
    for split in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split])
        try:
            return importlib.import_module(module_name), parts[split:]
        except ModuleNotFoundError:
            continue
    raise InvalidTargetError(path, "expected 'module:Class' or 'module.Class'")


def is_final_class(cls: type) -> bool:
    """Decorated with typing.final, not subclassable, or an enum with members."""
    if cls.__dict__.get("__final__", False):
        return True
    if not cls.__flags__ & _TPFLAGS_BASETYPE:
        return True
    return isinstance(cls, enum.EnumMeta) and len(cls.__members__) > 0


def is_readonly_class(cls: type) -> bool:
    """Frozen dataclass."""
    params = cls.__dict__.get("__dataclass_params__")
    return dataclasses.is_dataclass(cls) and params is not None and params.frozen


def is_protocol(cls: type) -> bool:
    return bool(cls.__dict__.get("_is_protocol", False))


def has_placeholder_body(func: Callable[..., object]) -> bool:
    """Body is only a docstring, ``...`` or ``pass``."""
    code = getattr(func, "__code__", None)
    if code is None or code.co_code not in _PLACEHOLDER_BODIES:
        return False
    # the same bytecode may return a real constant instead of None
    return all(c is None or c == func.__doc__ for c in code.co_consts)


def is_capability(cls: type) -> bool:
    """typing.Protocol class, or abstract ABC without any constructor.

    Everything else is a concrete target.
    """
    if is_protocol(cls):
        return True
    if not isinstance(cls, abc.ABCMeta) or not inspect.isabstract(cls):
        return False
    return _constructor_owner(cls) is None


def _is_skipped_base(cls: type) -> bool:
    return cls in _SKIPPED_BASES or cls.__module__ == "builtins"


def _declares_constructor(cls: type) -> bool:
    init = cls.__dict__.get("__init__")
    if init is None:
        return False
    return getattr(init, "__name__", "") not in _PROTOCOL_INIT_NAMES


def _constructor_owner(cls: type) -> type | None:
    for klass in cls.__mro__:
        if _is_skipped_base(klass):
            continue
        if _declares_constructor(klass):
            return klass
    return None


def _is_private(name: str, owner: type) -> bool:
    return name.startswith(f"_{owner.__name__.lstrip('_')}__")


def _visibility(name: str) -> Visibility:
    if name.startswith("_") and not (name.startswith("__") and name.endswith("__")):
        return Visibility.PROTECTED
    return Visibility.PUBLIC


def _read_signature(func: Callable[..., object]) -> inspect.Signature:
    """Signature with evaluated annotations; raw strings if evaluation fails."""
    try:
        return inspect.signature(func, eval_str=True)
    except (NameError, AttributeError, SyntaxError, TypeError):
        return inspect.signature(func)


class TypeDescriptorExtractor:
    """Extracts TargetDescriptor from a live class.

    Stateless - no state between extract() calls.
    """

    def extract(self, target: type | str) -> TargetDescriptor:
        """Describe one target type.

        Args:
            target: Class object or import path

        Returns:
            TargetDescriptor

        Raises:
            InvalidTargetError: If target does not exist, is not a class,
                is final or is readonly
            UnsupportedTypeConstraintError: If a method annotation cannot
                be represented
        """
        cls = resolve_target(target) if isinstance(target, str) else target
        if not isinstance(cls, type):
            raise InvalidTargetError(repr(target), f"is a {type(cls).__name__}, not a class")

        name = qualified_name(cls)
        is_final = is_final_class(cls)
        is_readonly = is_readonly_class(cls)

        # FAIL-FIRST: none of these can be safely subclassed
        if is_final:
            raise InvalidTargetError(name, "final classes cannot be mocked")
        if is_readonly:
            raise InvalidTargetError(name, "readonly classes cannot be mocked")

        ancestors = [k for k in cls.__mro__[1:] if not _is_skipped_base(k)]
        parent = next((qualified_name(k) for k in ancestors if not is_capability(k)), None)

        return TargetDescriptor(
            name=name,
            type_=cls,
            kind=TargetKind.CAPABILITY if is_capability(cls) else TargetKind.CONCRETE,
            methods=self._extract_methods(cls),
            parent=parent,
            capabilities=frozenset(qualified_name(k) for k in ancestors if is_capability(k)),
            constructor=self._extract_constructor(cls),
            is_final=is_final,
            is_readonly=is_readonly,
        )

    def _extract_constructor(self, cls: type) -> ConstructorInfo:
        owner = _constructor_owner(cls)
        if owner is None:
            return ConstructorInfo()

        from_capability = any(
            _declares_constructor(k) and is_capability(k)
            for k in owner.__mro__
            if not _is_skipped_base(k)
        )
        return ConstructorInfo(
            declared_by=qualified_name(owner),
            is_final=any(
                getattr(k.__dict__.get("__init__"), "__final__", False)
                for k in cls.__mro__
                if not _is_skipped_base(k)
            ),
            declared_in_capability=from_capability,
        )

    def _extract_methods(self, cls: type) -> tuple[MethodSignature, ...]:
        """Walk the MRO most-derived first; each name is decided once.

        A non-method or final attribute in a subclass hides the ancestor's method.
        """
        seen: set[str] = set()
        methods: list[MethodSignature] = []

        for klass in cls.__mro__:
            if _is_skipped_base(klass):
                continue
            for name, attr in vars(klass).items():
                if name in seen:
                    continue
                seen.add(name)

                method = self._extract_method(klass, name, attr)
                if method is not None:
                    methods.append(method)

        return tuple(methods)

    def _extract_method(self, owner: type, name: str, attr: object) -> MethodSignature | None:
        if name in _EXCLUDED_METHODS or _is_private(name, owner):
            return None

        if isinstance(attr, staticmethod):
            func, dispatch = attr.__func__, DispatchKind.STATIC
        elif isinstance(attr, classmethod):
            func, dispatch = attr.__func__, DispatchKind.CLASS
        elif inspect.isfunction(attr) or (callable(attr) and hasattr(attr, "__wrapped__")):
            func, dispatch = attr, DispatchKind.INSTANCE
        else:
            return None

        if getattr(attr, "__final__", False) or getattr(func, "__final__", False):
            return None

        where = f"{qualified_name(owner)}.{name}"
        signature = _read_signature(func)

        params = list(signature.parameters.values())
        if dispatch is not DispatchKind.STATIC and params and params[0].kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            params = params[1:]

        is_abstract = bool(getattr(attr, "__isabstractmethod__", False))

        return MethodSignature(
            name=name,
            parameters=tuple(self._convert_parameter(p, owner, where) for p in params),
            returns=return_contract(signature.return_annotation, owner, where),
            origin=qualified_name(owner),
            dispatch=dispatch,
            visibility=_visibility(name),
            is_abstract=is_abstract,
            is_async=inspect.iscoroutinefunction(func),
            # protocol members with a real body are inherited by explicit implementers
            delegable=not is_abstract
            and not (is_protocol(owner) and has_placeholder_body(func)),
            doc=inspect.getdoc(func),
        )

    def _convert_parameter(self, param: inspect.Parameter, owner: type, where: str) -> Parameter:
        annotation = param.annotation
        default = NO_DEFAULT if param.default is inspect.Parameter.empty else param.default
        return Parameter(
            name=param.name,
            kind=ParameterKind(param.kind.name),
            annotation=format_annotation(annotation, owner, where),
            # implicit None default makes the slot nullable
            nullable=allows_none(annotation) or default is None,
            is_reference=is_reference(annotation),
            default=default,
        )

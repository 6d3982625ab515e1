"""
Argument-based method dispatch (a.k.a. "control-path" templating) via decorators.

This module provides a small mechanism for routing a single method call to one
of several registered implementations based on a *state* computed from the
call's arguments.

Core idea
---------
- You define a *base* method on a class (its signature becomes the canonical one).
- You create a builder with a ``state_of`` function that maps call arguments
  to a hashable state (e.g., the pair of operand shapes).
- You then register multiple "control paths" for that method, each keyed by:
    (ClassName, MethodName, StateVal)
- At runtime, the wrapper computes ``state_of(*args, **kwargs)`` and
  dispatches to the implementation registered for that state.

Important notes
---------------
- This design mutates the class: the first time you decorate a control path,
  the original method name is replaced with a wrapper that performs dispatch.
- Registered implementations are stored in a closure-local mapping owned by
  `create_path_builder()`. Different builders do not share mappings.
- The wrapper calls the selected sub-method without passing `self`
  (i.e., `sm(*args, **kwargs)`), so sub-methods are plain functions of the
  call arguments.
"""

from typing import (
    Callable,
    Hashable,
    Optional,
    Dict,
    Type,
    Any,
)
from typing_extensions import ParamSpec, TypeVar
from collections import namedtuple
from functools import wraps

P = ParamSpec("P")
R = TypeVar("R")

TrapFactory = Callable[[Callable[..., Any], Hashable], BaseException]
"""Builds the exception raised when no control path matches a state."""


def create_path_builder(
    state_of: Callable[..., Hashable],
) -> Callable[
    [Type, Callable[P, R], Hashable, Optional[TrapFactory]],
    Callable[[Callable[P, R]], Callable[P, R]],
]:
    """
    Create and return a "path builder" function used to register control
    paths for methods.

    The returned function (`templator`) is used like this:

        decorator = create_path_builder(lambda x: type(x).__name__)

        class MyClass:
            def foo(self, x): ...

        @decorator(MyClass, MyClass.foo, "int")
        def foo_int(x):
            ...

        @decorator(MyClass, MyClass.foo, "str")
        def foo_str(x):
            ...

    When `MyClass().foo(...)` is called, it dispatches to `foo_int` or
    `foo_str` depending on `state_of(...)` evaluated on the call arguments.

    Parameters
    ----------
    state_of : Callable[..., Hashable]
        Computes the dispatch state from the arguments of a call (excluding
        `self`). Exceptions it raises propagate to the caller unchanged.

    Returns
    -------
    Callable
        A function with signature:

            (cls, method, state, trap_exception=None) -> decorator

        where `decorator(sub_method)` registers `sub_method` for that control
        path and replaces `cls.method` with a dispatcher wrapper.
    """

    MethodKey = namedtuple(
        "MethodKey",
        [
            "ClassName",
            "MethodName",
            "StateVal",
        ],
    )
    """
    Tuple-like key used to uniquely identify a control path.

    Fields
    ------
    ClassName : str
        The owning class name.
    MethodName : str
        The base method name being templated.
    StateVal : Hashable
        The state value that selects this implementation.
    """

    methods_map: Dict[MethodKey, Callable] = {}
    """Mapping from (class, method, state) keys to registered implementations."""

    def templator(
        cls: Type,
        method: Callable[P, R],
        state: Hashable,
        trap_exception: Optional[TrapFactory] = None,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Build a decorator that registers a control path implementation.

        Parameters
        ----------
        cls : Type
            The class whose method should be wrapped for dispatch. The wrapper
            is installed on this class under `method.__name__`.
        method : Callable[P, R]
            The base method being templated. Its signature and metadata (name,
            docstring, annotations) are used for the installed wrapper via
            `functools.wraps(method)`.
        state : Hashable
            The state value that selects the decorated implementation.
        trap_exception : Optional[TrapFactory]
            Controls what happens when a dispatch target is missing:

            - If `None`, the wrapper raises `NotImplementedError`.
            - Otherwise it is called as `trap_exception(method, state)` and
              the returned exception is raised.

        Returns
        -------
        Callable[[Callable[P, R]], Callable[P, R]]
            A decorator that registers `sub_method` for `(cls, method, state)`
            and installs the dispatcher wrapper on `cls.method.__name__`.

        Raises
        ------
        TypeError
            If `state` is not hashable.
        """
        try:
            hash(state)
        except TypeError:
            raise TypeError(
                f"The argument for 'state' must be hashable. Got {repr(state)}"
            )

        smk: MethodKey = MethodKey(cls.__name__, method.__name__, state)
        """Static method key for the control path being registered by this call."""

        def decorator(sub_method: Callable[P, R]) -> Callable[P, R]:
            """
            Register `sub_method` as the implementation for the configured state.

            Parameters
            ----------
            sub_method : Callable[P, R]
                The implementation to run when `state_of(...) == state`.

            Returns
            -------
            Callable[P, R]
                The original `sub_method` (returned unchanged), enabling normal
                decorator stacking and introspection.
            """
            methods_map[smk] = sub_method

            @wraps(method)
            def wrapper(self: Any, *args: P.args, **kwargs: P.kwargs) -> Any:
                """
                Dispatch to a registered implementation based on the call's state.
                """
                cur_state = state_of(*args, **kwargs)
                key = MethodKey(cls.__name__, method.__name__, cur_state)
                if sm := methods_map.get(key):
                    return sm(*args, **kwargs)
                if trap_exception is None:
                    raise NotImplementedError(
                        "Missing control path (state={}) for {}".format(
                            repr(cur_state), repr(method)
                        )
                    )
                raise trap_exception(method, cur_state)

            setattr(cls, method.__name__, wrapper)
            return sub_method

        return decorator

    return templator

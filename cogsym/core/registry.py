"""
cogsym/core/registry.py
=======================
Plugin registry — allows third parties to register custom inference
rules and rewrite rules without modifying core framework code.

Pattern: Registry.register("name", component, category=INFERENCE_RULES)
         Registry.get("name", category=INFERENCE_RULES) → component
"""
from __future__ import annotations
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)

INFERENCE_RULES = "inference_rule"
REWRITE_RULES   = "rewrite_rule"


class Registry:
    """Generic component registry with validation.

    Usage:
        # Register a custom inference rule
        Registry.register("contrapositive", my_rule_fn, category=INFERENCE_RULES)

        # Retrieve it
        fn = Registry.get("contrapositive", category=INFERENCE_RULES)
    """
    _store: Dict[str, Dict[str, Any]] = {}    # category → {name → component}

    @classmethod
    def register(
        cls,
        name:      str,
        component: Any,
        category:  str = "default",
        override:  bool = False,
    ) -> None:
        if category not in cls._store:
            cls._store[category] = {}
        if name in cls._store[category] and not override:
            raise KeyError(
                f"Component '{name}' already registered in category '{category}'. "
                "Use override=True to replace."
            )
        cls._store[category][name] = component
        logger.debug("Registered [%s] '%s'", category, name)

    @classmethod
    def unregister(cls, name: str, category: str = "default") -> None:
        cls._store.get(category, {}).pop(name, None)

    @classmethod
    def get(cls, name: str, category: str = "default") -> Any:
        try:
            return cls._store[category][name]
        except KeyError:
            available = list(cls._store.get(category, {}).keys())
            raise KeyError(
                f"Component '{name}' not found in category '{category}'. "
                f"Available: {available}"
            )

    @classmethod
    def contains(cls, name: str, category: str = "default") -> bool:
        return name in cls._store.get(category, {})

    @classmethod
    def list_all(cls, category: Optional[str] = None) -> Dict:
        if category:
            return dict(cls._store.get(category, {}))
        return {cat: list(items.keys()) for cat, items in cls._store.items()}

    @classmethod
    def decorator(cls, name: str, category: str = "default", override: bool = False):
        """Use as decorator: @Registry.decorator('my_rule', INFERENCE_RULES)"""
        def _register(component):
            cls.register(name, component, category=category, override=override)
            return component
        return _register

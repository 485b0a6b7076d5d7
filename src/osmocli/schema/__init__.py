"""
Schema - Typed model of daemon responses.

The JSON printed by ``osmosisd query tx --output=json`` is validated
against a JSON Schema and then loaded into frozen dataclasses.
"""

"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan los servicios concretos.
- El motor espacial depende del contrato del codec, no de `GridCodec`.
"""

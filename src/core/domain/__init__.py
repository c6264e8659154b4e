"""Modelos y entidades del dominio.

Por qué:
- Aquí viven los tipos de valor puros e inmutables (Pydantic v2).
- El dominio no conoce la CLI ni la configuración: solo celdas, coordenadas
  y el alfabeto de la rejilla.
"""

# -*- coding: utf-8 -*-
"""
backend/app/__init__.py

Inicializador del paquete principal 'app' del backend de Terra Orgânica.

Permite que los módulos internos puedan importarse como 'app.*'
cuando la carpeta raíz del backend se incluye en PYTHONPATH.

Fecha: 19/10/2026
"""

# Fin del archivo backend/app/__init__.py

# app/shared/__init__.py
"""
Componentes compartidos entre módulos: configuración, cliente HTTP,
integraciones externas (WordPress, YouTube) y utilidades de respuesta.
"""
# fin del archivo

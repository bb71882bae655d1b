"""WSGI entrypoint for deploying the GSTCalc backend behind Passenger."""

from gstcalc.backend.app import create_app

# Passenger expects a module-level variable named ``application``.
application = create_app()

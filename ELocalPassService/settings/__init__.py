"""
Settings for the ELocalPass service.

Pick a module with ``DJANGO_SETTINGS_MODULE``: ``dev`` (the default in
manage.py), ``test`` for pytest, ``prod`` behind the load balancer. All of
them extend ``base``; ``logging`` builds the LOGGING dict.
"""

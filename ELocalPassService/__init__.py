"""
ELocalPass partner network Django project.
"""

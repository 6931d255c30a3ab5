"""Creational patterns: how objects are built and shared."""
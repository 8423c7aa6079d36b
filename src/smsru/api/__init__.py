"""Codec e transporte da API SMS.RU."""

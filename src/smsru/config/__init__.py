"""Configuração do cliente SMS.RU (settings e logging)."""

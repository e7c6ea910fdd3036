"""Use cases — orquestração sem IO direto."""

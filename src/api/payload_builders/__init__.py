"""Payload builders: construção de payloads para APIs externas."""

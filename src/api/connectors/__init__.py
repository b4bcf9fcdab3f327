"""Connectors por canal: adapters de borda para APIs externas.

Estrutura:
- github/: entrada de webhooks (assinatura + parsing)
- telegram/: Telegram Bot API (sendMessage, setWebhook, getWebhookInfo)

Cada canal tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []

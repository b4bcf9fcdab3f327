"""App: orquestração, casos de uso e infraestrutura do relay.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (relay GitHub, comandos do bot)
- services/: formatação de mensagens e resolução do chat de destino
- domain/: registros de notificação, mensagens e taxonomia de erros
- infra/: implementações concretas de IO e cripto
- protocols/: contratos/interfaces
- observability/: correlation_id dos logs estruturados
- constants/: constantes da aplicação

Padrão: app executa; api adapta; config configura.
"""

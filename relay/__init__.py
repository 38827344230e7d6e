"""Pacote do relay GitLab -> Discord.

Este pacote contém:
- constants: variáveis de ambiente e constantes de formatação
- events: decodificação do payload do webhook do GitLab
- formatters: formatação de eventos em mensagens Markdown do Discord
- services: integração com serviços externos (Discord)
- controller: criação do Flask app e endpoints
"""

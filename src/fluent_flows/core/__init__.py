# src/fluent_flows/core/__init__.py
"""
Core das flows.

Componentes principais:
    - pipeline   → contratos de Step/Condition, descritores, registry e trace
    - engine     → builder `Flow` e composição (planner)
    - config     → carregamento e sobreposição de configuração
    - errors     → payloads canônicos de erro
    - exceptions → exceções tipadas

Limites explícitos:
    - Não contém steps de domínio
    - Não depende de CLI ou serviços externos
"""

# src/fluent_flows/core/engine/__init__.py
"""
Engine das flows.

Componentes principais:
    - flow    → builder fluente `Flow` e `execute`
    - planner → composição da direita para a esquerda e traces

Invariantes:
    - A ordem observável de execução é a ordem de inserção
    - Falhas propagam sem alteração até um `catch` ou até o chamador
"""

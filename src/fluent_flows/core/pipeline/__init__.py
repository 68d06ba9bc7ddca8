# src/fluent_flows/core/pipeline/__init__.py
"""
# Pipeline Core — fluent-flows

Contratos e estruturas que compõem uma flow.

## Componentes

- **types**: `StepKind`, `StepDescriptor`, `describe_action`
- **step**: protocolos `Step`, `Condition`, `Workflow`, `Resolver`, `FlowLogger`
- **registry**: `StepRegistry`, resolução por identificador
- **context**: `RunContext`, logger estruturado de trace

## Invariantes

- Steps comunicam-se apenas via payload e continuação
- Resolução acontece a cada execução, nunca na montagem da flow
"""

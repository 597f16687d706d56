# src/riveter/core/__init__.py
"""
Core do Riveter.

Este pacote contém a implementação canônica do motor de atributos
tipados, independente de frameworks web, ORMs ou validadores.

Componentes principais:
    - attributes → type tags, definições, registry, coerção e accessors
    - params     → pipeline filter → clean → apply
    - context    → event log estruturado por instância
    - config     → carregamento, merge, hashing e settings de coerção
    - exceptions / errors → exceções tipadas e payloads serializáveis

Limites explícitos:
    - Não realiza I/O de banco de dados
    - Não define regras de validação (apenas expõe metadados)
    - Não gerencia ciclo de vida de persistência
"""

# src/rnpm_config/core/__init__.py
"""
Core do rnpm-config.

Este pacote reúne as responsabilidades essenciais para localizar o
manifest de um pacote, extrair a configuração reservada e delegar a
montagem da configuração final aos builders de cada plataforma.

Componentes principais:
    - settings  → parâmetros da ferramenta (nome do manifest, chave reservada)
    - manifest  → leitura do `package.json` e extração da chave reservada
    - platforms → contrato e registro dos builders de plataforma
    - resolver  → resolução de projeto e de dependência
    - log       → coleta estruturada de warnings
    - errors    → payloads canônicos de erro

Princípios fundamentais:
    - Nenhum estado global: diretório de trabalho é sempre injetado
    - Ausência de manifest é um resultado explícito, não uma exceção
    - Falhas de parse sempre propagam com contexto estruturado

Limites explícitos:
    - Não implementa os builders de plataforma (colaboradores externos)
    - Não faz cache de manifests
    - Não observa o filesystem
"""

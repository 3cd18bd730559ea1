# src/atlas_settings/core/errors.py
"""
Exceções canônicas do store de settings do Atlas Settings.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a resolução, conversão e persistência de settings.

Taxonomia:
    - Documento corrompido → `InvalidSettingsDocumentError` (recuperado
      localmente pelo codec: o layer resultante é vazio)
    - Chave inexistente até no layer default → `KeyUndefinedError`
    - Conversão de tipo incompatível → `ValueKindError`
    - Escrita no layer default → `ImmutableLayerError`

Falhas de I/O ao salvar (disco cheio, permissões) não são encapsuladas:
o `OSError` original é propagado ao chamador.

Invariantes:
    - Todas as exceções do store herdam de `SettingsError`
    - A ausência normal de um layer opcional nunca gera exceção
"""

from typing import Optional


class SettingsError(Exception):
    """
    Exceção base para erros do store de settings.

    Permite captura genérica de falhas do store sem confundi-las com
    erros de I/O do sistema operacional.
    """


class KeyUndefinedError(SettingsError, KeyError):
    """
    Exceção levantada quando uma chave não é definida nem pelo layer default.

    Uma chave ausente dos layers opcionais é estado normal; uma chave
    ausente até do layer default (sem fallback informado pelo chamador)
    indica erro de programação: o nome da chave não corresponde a nenhum
    setting conhecido.

    Attributes:
        key (str): Chave solicitada.
    """

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Chave de setting não definida no layer default: {self.key!r}"


class ValueKindError(SettingsError, TypeError):
    """
    Exceção levantada quando um valor não corresponde ao tipo esperado.

    Substitui o cast não verificado: os conversores de `values` falham
    explicitamente quando o valor armazenado tem outro tipo.

    Attributes:
        expected (str): Nome do tipo esperado.
        value: Valor recebido.
    """

    def __init__(self, expected: str, value: object, key: Optional[str] = None):
        self.expected = expected
        self.value = value
        self.key = key
        where = f" na chave {key!r}" if key else ""
        super().__init__(
            f"Esperado {expected}{where}, recebido {type(value).__name__}: {value!r}"
        )


class InvalidSettingsDocumentError(SettingsError):
    """
    Exceção levantada quando um documento de settings não pode ser interpretado.

    Exemplos:
        - YAML malformado ou truncado
        - raiz do documento não é um mapa chave-valor
        - chave não textual
        - tag desconhecida ou valor tagueado inválido

    O codec captura esta exceção em `load_layer` e devolve um layer vazio;
    ela só chega ao chamador via `parse_document`.
    """


class ImmutableLayerError(SettingsError):
    """
    Exceção levantada ao tentar mutar ou persistir o layer default.

    O layer default é construído uma única vez a partir dos dados
    embarcados no pacote e nunca é alterado ou gravado em disco.
    """

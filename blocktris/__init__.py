"""blocktris: jogo de blocos em queda com placar persistido."""

__version__ = "0.1.0"

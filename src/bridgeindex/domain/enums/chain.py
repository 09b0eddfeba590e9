from enum import Enum


class VmType(str, Enum):
    """Virtual-machine family of a chain. Decides address case rules."""

    EVM = "evm"
    SVM = "svm"


class ChainType(str, Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"

from enum import Enum


class MovementType(str, Enum):
    IN = "IN"
    OUT = "OUT"
    TRANSFER = "TRANSFER"
    ADJUSTMENT = "ADJUSTMENT"


class AccountType(str, Enum):
    assets = "Assets"
    liabilities = "Liabilities"
    equity = "Equity"
    revenue = "Revenue"
    expenses = "Expenses"
    cost_of_goods_sold = "Cost of Goods Sold"

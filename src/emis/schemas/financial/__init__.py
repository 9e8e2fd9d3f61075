# Index for financial schemas
from __future__ import annotations
__all__ = []
from .budget import (
    BudgetCategory, BudgetLineItem, Budget, BudgetVariance, CategorySpending, BudgetTrend,
    BudgetAnalytics,
)
__all__ += ['BudgetCategory','BudgetLineItem','Budget','BudgetVariance','CategorySpending','BudgetTrend',
            'BudgetAnalytics']
from .fees import FeeStructure, FeePayment, FeeWaiver, FeeCollectionAnalytics
__all__ += ['FeeStructure','FeePayment','FeeWaiver','FeeCollectionAnalytics']
from .supplies import (
    SupplyCategory, SupplyItem, SupplyOrder, SupplyOrderLine, SupplyUtilization,
    SupplyCategoryBreakdown, LowStockItem, SupplyTrend, SupplyAnalytics,
)
__all__ += ['SupplyCategory','SupplyItem','SupplyOrder','SupplyOrderLine','SupplyUtilization',
            'SupplyCategoryBreakdown','LowStockItem','SupplyTrend','SupplyAnalytics']
from .financial_analytics import (
    FinancialSummary, FinancialTrend, FinancialHealthIndicator, FinancialForecast,
    FinancialAnalytics,
)
__all__ += ['FinancialSummary','FinancialTrend','FinancialHealthIndicator','FinancialForecast',
            'FinancialAnalytics']

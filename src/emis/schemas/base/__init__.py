# Index for the shared base schemas
from __future__ import annotations
__all__ = []
from .model import EMISModel
__all__ += ['EMISModel']
from .common_validators import (
    UUIDStr, Email, Phone, ISODate, ISODateTime, Url, Timezone, CountryCode, IdentifierNumber,
    MonthStr, TimeOfDay, FiscalYear, Number, Integer, Percentage, PositiveNumber,
    NonNegativeNumber, NonNegativeInt, Currency, SignedCurrency, Year, Score, GPA,
    Latitude, Longitude, YearsOfService, Correlation, GradeLevel, GRADE_ORDER, CURRENCY_MAX,
    grade_ordinal, number, integer,
)
__all__ += ['UUIDStr','Email','Phone','ISODate','ISODateTime','Url','Timezone','CountryCode','IdentifierNumber',
            'MonthStr','TimeOfDay','FiscalYear','Number','Integer','Percentage','PositiveNumber',
            'NonNegativeNumber','NonNegativeInt','Currency','SignedCurrency','Year','Score','GPA',
            'Latitude','Longitude','YearsOfService','Correlation','GradeLevel','GRADE_ORDER','CURRENCY_MAX',
            'grade_ordinal','number','integer']
from .address import Address
__all__ += ['Address']
from .contact import ContactInfo, RequiredContactInfo
__all__ += ['ContactInfo','RequiredContactInfo']
from .audit import AuditFields, BaseEntity
__all__ += ['AuditFields','BaseEntity']
from .profile import ProfileMixin
__all__ += ['ProfileMixin']

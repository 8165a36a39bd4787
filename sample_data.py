# The case-study rows. Reviews 30-70 point at employee ids that were
# never loaded (10, 22, 11, 12, 13).
from datetime import date

from models import AnnualReview, Employee

EMPLOYEES = [
    Employee(1, "Bob", "Smith", date(2009, 6, 20), date(2016, 1, 1), 10000),
    Employee(2, "Joe", "Jarrod", date(2010, 12, 2), None, 20000),
    Employee(3, "Nancy", "Soley", date(2012, 3, 14), None, 30000),
    Employee(4, "Keith", "Widjaja", date(2013, 10, 9), date(2014, 1, 1), 20000),
    Employee(5, "Kelly", "Smalls", date(2013, 10, 9), None, 20000),
    Employee(6, "Frank", "Nguyen", date(2015, 10, 4), date(2016, 5, 1), 60000),
]

REVIEWS = [
    AnnualReview(10, 1, date(2016, 1, 1)),
    AnnualReview(20, 2, date(2016, 4, 12)),
    AnnualReview(30, 10, date(2015, 2, 13)),
    AnnualReview(40, 22, date(2010, 10, 12)),
    AnnualReview(50, 11, date(2009, 1, 1)),
    AnnualReview(60, 12, date(2009, 3, 3)),
    AnnualReview(70, 13, date(2008, 10, 1)),
    AnnualReview(80, 1, date(2003, 4, 12)),
    AnnualReview(90, 1, date(2014, 4, 30)),
]

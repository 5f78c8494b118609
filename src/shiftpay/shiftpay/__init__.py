"""shiftpay package.

Attendance state and pay computation engine, organized by feature modules
(attendance, noshow, payroll, compliance, ...) with a thin Flask controller
layer on top of service/repository layers.
"""

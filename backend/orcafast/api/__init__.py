"""
API Package
Projeto: OrçaFAST (Orçamentos e Contratos)
"""

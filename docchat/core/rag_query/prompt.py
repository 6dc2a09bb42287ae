"""
Grounded answer prompt.

Defines the single generation prompt: retrieved context, the literal user
question, and citation instructions.

Dependencies: langchain_core.prompts
System role: Prompt template for grounded generation
"""

from langchain_core.documents import Document
from langchain_core.prompts import PromptTemplate

RAG_PROMPT = PromptTemplate.from_template(
    """Context:
{context}

Question: {question}

Instructions:
1. Answer the question based only on the provided context.
2. If you use specific information from the context, indicate the source using [1], [2], etc., corresponding to the order of the sources in the context.
3. At the end, list the references for each source you indicated with the document name and page number.
4. If you're unsure or the information is not in the context, say so.

Answer:"""
)


def format_context(documents: list[Document]) -> str:
    """Join retrieved chunk texts with blank lines, in retrieval order."""
    return "\n\n".join(doc.page_content for doc in documents)


def build_prompt(documents: list[Document], question: str) -> str:
    """
    Render the generation prompt.

    Args:
        documents: Retrieved chunks in retrieval order
        question: User question, inserted verbatim

    Returns:
        str: Prompt text for the generation capability
    """
    return RAG_PROMPT.format(context=format_context(documents), question=question)

"""Shared fixtures for the wwwaxe test suite."""

import pytest
from fastapi.testclient import TestClient

BLOG_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>My Blog Post</title>
  <meta name="description" content="A great article about coding">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <meta name="generator" content="Next.js">
  <link rel="stylesheet" href="/styles.css">
  <link rel="canonical" href="https://example.com/blog/post">
  <script src="/analytics.js"></script>
  <style>.hero { background: linear-gradient(blue, purple); }</style>
</head>
<body class="dark-theme antialiased" data-page="blog" onclick="trackPageView()">
  <div id="__next">
    <nav id="main-nav" class="sticky top-0 z-50 bg-white shadow-md px-4 py-2">
      <a href="/" class="logo text-xl font-bold text-gray-900">My Site</a>
      <div class="flex gap-4">
        <a href="/about" class="text-gray-600 hover:text-black">About</a>
        <a href="/blog" class="text-gray-600 hover:text-black">Blog</a>
        <a href="/contact" class="text-gray-600 hover:text-black">Contact</a>
      </div>
    </nav>
    <main class="container mx-auto px-4 py-8 max-w-3xl">
      <article class="prose prose-lg prose-gray">
        <h1 class="text-4xl font-extrabold tracking-tight mb-4">Hello World</h1>
        <p class="text-gray-500 text-sm mb-8">Published on <time datetime="2024-01-15">January 15, 2024</time></p>
        <p class="text-gray-700 leading-relaxed">This is my <a href="/post" class="text-blue-500 underline">blog post</a> about interesting things.</p>
        <img src="/photo.jpg" alt="A beautiful photo" class="rounded-lg shadow-xl my-8" loading="lazy" width="800" height="600" decoding="async">
        <h2 class="text-2xl font-bold mt-8 mb-4">Section Two</h2>
        <p class="text-gray-700 leading-relaxed">More content here with <strong>bold text</strong> and a list:</p>
        <ul class="list-disc pl-6 space-y-2">
          <li class="text-gray-700">First item</li>
          <li class="text-gray-700">Second item</li>
          <li class="text-gray-700">Third item</li>
        </ul>
      </article>
    </main>
    <footer class="bg-gray-100 py-8 mt-16">
      <div class="container mx-auto px-4 text-center text-gray-500 text-sm">
        <p>&copy; 2024 My Site. All rights reserved.</p>
      </div>
    </footer>
  </div>
  <script>
    window.__NEXT_DATA__ = {"props":{"pageProps":{}}};
    (function() { /* analytics */ })();
  </script>
  <noscript><img src="/pixel.gif" alt=""></noscript>
</body>
</html>"""


@pytest.fixture
def blog_html() -> str:
    return BLOG_HTML


@pytest.fixture
def client():
    from main import app

    with TestClient(app) as c:
        yield c
